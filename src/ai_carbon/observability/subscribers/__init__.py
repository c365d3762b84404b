"""Event subscribers registered by emitter.configure()."""
