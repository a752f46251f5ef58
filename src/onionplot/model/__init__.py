"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the rendering surface (matplotlib).
It deals with Geometry, Task records, and I/O.
"""
