"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the Visualization (pyqtgraph).
It deals with the diffraction physics, the input range policy and the export.
"""
