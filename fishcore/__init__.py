"""Core building blocks for a 2D side-scrolling arcade game: configuration,
input bindings, geometry, noise, JSON/TOML helpers and networking types."""

__version__ = "0.1.0"