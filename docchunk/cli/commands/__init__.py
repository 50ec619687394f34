# docchunk/cli/commands/__init__.py
