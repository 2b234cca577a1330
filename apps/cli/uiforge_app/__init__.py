"""UI Forge command line application."""
