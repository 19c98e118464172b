from __future__ import annotations

from typing import Final

# A schemeless-looking opaque base, usable when only the query matters
DEFAULT_URL: Final = "none:"

RELATIVE_URL_WITHOUT_BASE: Final = "relative URL without a base"
