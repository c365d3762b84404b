"""CarbonEventLinker: isolated event namespace for ai_carbon observability.

All ai_carbon subscribers register here. Separate from any other
pyventus usage in the process.
"""

from __future__ import annotations

from pyventus.events import EventLinker


class CarbonEventLinker(EventLinker):
    """Isolated event namespace for ai_carbon observability."""

    pass
