"""
Core translation engine: the Dart emitter and the per-program driver.
"""
