"""Markdown inline link pattern."""

import re

# [text](target); text may hold `code spans` containing brackets.
# A backtick is plain text unless it opens a span holding a bracket, so each text has one parse.
MARKDOWN_LINK_PATTERN = re.compile(r"\[((?:[^\[\]`]|`|`[^`\[\]]*[\[\]][^`]*`)*)\]\((.*?)\)")
