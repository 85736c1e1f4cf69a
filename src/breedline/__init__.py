"""breedline - Pedigree and heredity engine for poultry breeding.

Multi-generation pedigree traversal, inbreeding estimation by path counting,
lineage completeness scoring, Mendelian offspring simulation and
genotype-to-appearance resolution.
"""

__version__ = "0.1.0"

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "models":
        from breedline import models
        return models
    if name == "genetics":
        from breedline import genetics
        return genetics
    if name == "pedigree":
        from breedline import pedigree
        return pedigree
    if name == "config":
        from breedline import config
        return config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
