"""
fakevasp: an interactive VASP stand-in for test harnesses.

- emulator: copies the input templates and replays the progress transcript
- session: drives an interactive child process over its stdin/stdout
- stopcar: writes and clears the STOPCAR sentinel
"""

__version__ = "0.1.0"
