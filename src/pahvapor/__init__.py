"""PAH vapor pressure explorer based on the Antoine equation."""
