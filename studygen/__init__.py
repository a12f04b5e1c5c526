"""studygen -- C++ scaffolding generator for charting-host studies.

Reads a declarative JSON description of a study (a technical-indicator
plugin) and emits the class header plus a once-only implementation stub.
"""

__version__ = "0.1.0"
