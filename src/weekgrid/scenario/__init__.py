"""Schedule document contract and loaders."""
