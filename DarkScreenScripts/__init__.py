"""
Dark Screen - full-screen color panel with keep-awake toggle
"""
