"""
GrainScan: motor estadístico y clasificador taxonómico de muestras de sedimento.
"""
__version__ = "0.1.0"
