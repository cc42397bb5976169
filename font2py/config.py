import logging

# Path commands. Case is preserved; upper case is absolute, lower case relative.
GENERAL_COMMANDS = "mlhvcsqtaMLHVCSQTA"
CLOSE_COMMANDS = "zZ"

# Numeric grammar. ASCII only, no exponents, no leading-dot decimals.
WHITESPACE = "\t\n\f\r "
DIGITS = "0123456789"
SEPARATORS = "," + WHITESPACE + "+"

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING
