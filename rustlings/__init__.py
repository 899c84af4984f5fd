"""Terminal output helpers, rust-project.json generation and worked answers to small Rust exercises."""

__version__ = "0.1.0"