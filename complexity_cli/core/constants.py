"""
Constants used throughout the application.
"""

# Input handling
DEFAULT_SENTINEL = "END"
DEFAULT_COMMENT_TOKEN = "//"

# Output formats
OUTPUT_FORMATS = ("table", "json")
DEFAULT_OUTPUT_FORMAT = "table"

# Keywords that look like calls but never name a function definition
CONTROL_KEYWORDS = frozenset(
    {"if", "for", "while", "switch", "catch", "return", "sizeof"}
)
