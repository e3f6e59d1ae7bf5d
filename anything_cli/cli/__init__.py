"""
CLI Client Module.

Argument handling and request assembly for the command line.

Architecture:
- The CLI is a thin presentation layer; the server decides what happens
- Positional segments form the URL path, flags form the query string
- The response is either printed as-is or executed as directives
- self:* segments are handled locally (config, update, uninstall)
"""
