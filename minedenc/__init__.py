"""Character mapping tables, CJK codes, encoding state and keyboard input maps."""

__version__ = "0.1.0"
__all__ = ["charprops", "cjkcodes", "charmaps", "encoding", "keymap", "keymaps"]