"""
The VIEW layer: PySide6 widgets and pyqtgraph plots.
It reads from and writes to a DiffractionCalculator, never the other way round.
"""
