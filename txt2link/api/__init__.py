"""txt2link API layer."""
