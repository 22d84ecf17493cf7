"""
The MODEL layer contains pure data structures and chart geometry.
It has NO knowledge of the GUI (Qt) or the drawing surface (pyqtgraph).
"""
