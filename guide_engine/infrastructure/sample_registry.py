import ast
import importlib
import inspect
import io
from contextlib import redirect_stdout
from types import ModuleType
from typing import Dict, List, Union

from guide_engine.core.consts import PatternName
from guide_engine.utils.logger import log_debug

SAMPLES_PACKAGE = "guide_engine.samples"


class SampleRegistry:
    """
    Factory des exemples de code.
    Associe chaque pattern du catalogue à son module d'exemple et sait
    en extraire la source ou l'exécuter en capturant la console.
    """

    DEFAULT_MODULES: Dict[PatternName, str] = {
        PatternName.SINGLETON: "singleton",
        PatternName.OBSERVER: "observer",
        PatternName.FACTORY: "factory",
        PatternName.ABSTRACT_FACTORY: "abstract_factory",
        PatternName.ADAPTER: "adapter",
        PatternName.DECORATOR: "decorator",
        PatternName.FACADE: "facade",
        PatternName.COMPOSITE: "composite",
        PatternName.STRATEGY: "strategy",
        PatternName.STATE: "state",
    }

    def __init__(self, modules: Dict[PatternName, str] = None):
        self.modules = dict(modules or self.DEFAULT_MODULES)

    def module_name(self, pattern: Union[PatternName, str]) -> str:
        pattern = PatternName.parse(pattern)
        if pattern not in self.modules:
            raise ValueError(f"❌ Aucun exemple enregistré pour : {pattern.value}")
        return f"{SAMPLES_PACKAGE}.{self.modules[pattern]}"

    def get_module(self, pattern: Union[PatternName, str]) -> ModuleType:
        return importlib.import_module(self.module_name(pattern))

    def get_source(self, pattern: Union[PatternName, str]) -> str:
        """Code source complet du module d'exemple (tel qu'affiché dans le guide)."""
        return inspect.getsource(self.get_module(pattern)).rstrip() + "\n"

    def run(self, pattern: Union[PatternName, str]) -> str:
        """Exécute le main() de l'exemple et retourne ce qu'il a affiché."""
        module = self.get_module(pattern)
        log_debug(f"Exécution de l'exemple {module.__name__}")

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            module.main()
        return buffer.getvalue()

    def imports_of(self, pattern: Union[PatternName, str]) -> List[str]:
        """
        Liste les autres modules d'exemple importés par celui-ci.
        Une fiche autonome retourne une liste vide.
        """
        own = self.module_name(pattern)
        tree = ast.parse(self.get_source(pattern))
        sample_names = set(self.modules.values())

        found = []
        for node in ast.walk(tree):
            names = []
            if isinstance(node, ast.Import):
                names = [alias.name for alias in node.names]
            elif isinstance(node, ast.ImportFrom):
                if node.level > 0:
                    # Import relatif au paquet des exemples
                    base = node.module or ""
                    names = [base] if base else [alias.name for alias in node.names]
                    names = [f"{SAMPLES_PACKAGE}.{n}" for n in names]
                elif node.module:
                    names = [node.module]
                    if node.module == SAMPLES_PACKAGE:
                        names = [f"{SAMPLES_PACKAGE}.{alias.name}" for alias in node.names]

            for name in names:
                if not name.startswith(SAMPLES_PACKAGE + "."):
                    continue
                short = name[len(SAMPLES_PACKAGE) + 1:].split(".")[0]
                full = f"{SAMPLES_PACKAGE}.{short}"
                if short in sample_names and full != own and full not in found:
                    found.append(full)
        return found
