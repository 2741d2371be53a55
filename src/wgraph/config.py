# src/wgraph/config.py
"""
Configuración del proyecto. Los valores con variable de entorno se pueden
sobrescribir sin tocar el código.
"""
import os

# Nivel de logging (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("WGRAPH_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Peso por defecto para aristas sin peso explícito
DEFAULT_EDGE_WEIGHT = 1.0

# Formato de aristas en la CLI: A-B:peso
EDGE_TOKEN_SEPARATOR = "-"
WEIGHT_SEPARATOR = ":"
