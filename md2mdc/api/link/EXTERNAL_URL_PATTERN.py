"""External URL prefix pattern."""

import re

EXTERNAL_URL_PATTERN = re.compile(r"^https?://")
