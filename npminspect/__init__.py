"""npminspect - npm package and manifest inspection toolkit."""

__version__ = "0.1.0"
