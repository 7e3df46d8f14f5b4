"""
This package contains the codec for the NAD RS-232 text protocol.

Sub-packages handle each direction of the link:

- ``commands``: Command validation and frame rendering.
- ``replies``: Reply frame decoding and on/off interpretation.
"""
