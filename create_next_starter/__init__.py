"""create-next-starter -- scaffold a Next.js project from a bundled starter."""

__version__ = "0.1.0"
