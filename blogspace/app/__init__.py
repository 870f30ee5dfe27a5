"""BlogSpace application shell: state and terminal presentation."""
