"""Terminal front end: key input, rendering and the scoped terminal session."""
