"""
The APP layer: PySide6 widgets and the pyqtgraph chart.
Run with: python -m pahvapor
"""
