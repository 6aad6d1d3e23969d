"""
Centralized constants and defaults for clsx
"""

# Separator placed between included class names
SEPARATOR = " "

# Infix marker between a class value and its condition in text expressions
CONDITION_MARKER = "=>"

# Delimiter between items in text expressions
ITEM_DELIMITER = ","

# Prefix that negates a condition in text expressions
NEGATION_PREFIX = "!"

# Literal condition keywords
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

DEFAULT_LOG_LEVEL = "WARNING"
