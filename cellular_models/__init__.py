"""In-memory 5D cellular automaton models and their lazily evaluated views."""
