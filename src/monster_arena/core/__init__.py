"""Core combat definitions: data enums and the narration event system."""
