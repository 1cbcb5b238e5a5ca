"""contractdesk: contract template rendering and workflow client.

Renders music-industry contracts (producer and management agreements)
from fixed templates and user variables, converts them to HTML or DOCX,
and talks to an external drafting/review workflow service.
"""

__version__ = "0.1.0"
