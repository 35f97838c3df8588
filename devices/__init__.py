"""Flow devices: Mixer and Reactor over the abstract Device."""
