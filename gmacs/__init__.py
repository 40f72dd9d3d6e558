"""Parts of a small Emacs-like terminal text editor: buffers, cursor motion, modes, commands, buffer listing and key parsing."""

__version__ = "0.1.0"