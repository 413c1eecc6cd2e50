"""Text parsers and serializers: the ``--args`` list literal and the TOML codec."""
