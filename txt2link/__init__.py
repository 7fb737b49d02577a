"""txt2link - convert text files that hold a path into symlinks to that path."""
