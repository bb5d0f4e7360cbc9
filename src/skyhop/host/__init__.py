"""
Pygame host: window, ticker, input capture, rendering and sound cues.
"""
