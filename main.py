"""
Watermark Manager - Main Entry Point
====================================
An interactive console tool for adding text or image watermarks.

Usage:
    python main.py

Architecture:
    - Model: watermark_manager/core/ (pure image algorithms)
    - Runner: watermark_manager/pipeline/ (load, mark, edit, save)
    - Session: watermark_manager/cli/ (click prompts and state loop)

Features:
    - Centred text watermark with the built-in font
    - Centred image watermark blended at half opacity
    - Optional brighten, contrast, black & white and invert edits
    - Output saved next to the input as <name>-with-watermark.<ext>
"""

from watermark_manager.cli import main


if __name__ == "__main__":
    main()
