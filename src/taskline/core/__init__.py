"""
Command pipeline core.

Components:
- parser.py: raw line -> command word, details, index
- validator.py: ordered pre-dispatch checks
- commands.py: typed command variants and build_command()
- errors.py: user-facing error taxonomy
"""
