"""
noaudio - strip audio tracks from MP4/MOV recordings without re-encoding.
"""

__version__ = "1.0.0"
