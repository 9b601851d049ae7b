"""pluggy hook specifications."""
