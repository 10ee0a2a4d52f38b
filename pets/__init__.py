"""Pet chat and child-image generation module."""
