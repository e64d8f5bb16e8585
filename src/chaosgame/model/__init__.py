"""
The MODEL layer contains pure data structures and the chaos game logic.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Step generation, Render commands and Playback.
"""
