"""
Define la interfaz base para todos los nodos del pipeline de análisis.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class PipelineNode(ABC):
    """
    Clase base abstracta para un nodo de procesamiento en el pipeline.

    Cada 'nodo' representa un paso atómico del análisis (histograma,
    parámetros de Folk & Ward, clasificación, exportación). Los nodos sólo
    guardan su configuración: todo dato de un análisis viaja en el contexto,
    por lo que una misma instancia puede atender análisis independientes.

    Attributes:
        name (str): El nombre del nodo, utilizado para logging y seguimiento.
    """
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Ejecuta la lógica de procesamiento del nodo.

        El nodo lee del diccionario de 'contexto' los datos generados por los
        nodos anteriores, realiza su cálculo y escribe sus resultados en el
        mismo diccionario.

        Args:
            context (Dict[str, Any]): Estado del análisis en curso.

        Returns:
            Dict[str, Any]: El contexto, con los resultados de este nodo.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
