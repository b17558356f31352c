"""Leading metadata block pattern."""

import re

# Opening ---, lazily up to the next ---, plus trailing whitespace; start of text only
FRONTMATTER_PATTERN = re.compile(r"^---[\s\S]*?---\s*")
