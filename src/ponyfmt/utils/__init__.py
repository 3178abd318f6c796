"""
Utilities Package.

- ``console``: Rich-backed logging helpers.
- ``files``: ``.pony`` file discovery.
- ``visualizer``: Rich tree rendering of syntax trees.
"""
