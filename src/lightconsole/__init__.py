"""lightconsole -- Operator console for the lighting bridge.

This package implements a small console that turns discrete operator
actions (light on/off, fade to black, toggle DSK) into single HTTP
commands against the lighting bridge, and reports whether each command
succeeded.
"""

__version__ = "0.1.0"
