"""
The MODEL layer holds the explorer's UI state and display helpers.
It has NO knowledge of the GUI (Qt); it only calls into the pure core.
"""
