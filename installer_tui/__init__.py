"""
installer_tui: cosmetic EndeavourOS-style installer mockup built on Textual.

Modules:
- wizard: Textual app hosting the loop
- controller: render/poll loop and key dispatch
- screens: static screen definitions and their renderer
- utils.layout_utils: line centering, header and spinner footer
- utils.state_utils: loop state counters
"""

__version__ = "0.1.0"
