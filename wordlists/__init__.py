"""Word lists bundled with typing-drill."""
