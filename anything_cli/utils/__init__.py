"""Git context and executable-name helpers."""
