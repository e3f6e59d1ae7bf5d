"""
anything-cli.

Turns shell-style arguments into a GET request against a configured API
and runs the directives the server sends back.

- cli/: Argument handling, request assembly, internal self:* commands
- core/: Configuration, logging, exceptions
- protocol/: Directive envelope validation and execution
- utils/: Git context and executable-name discovery
"""

__version__ = "0.4.0"
