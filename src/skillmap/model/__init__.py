"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt). It deals with the skill map items,
graph construction, progression rules, geometry and I/O.
"""
