"""
Moteur du guide des Design Patterns
Architecture : Catalogue (JSON) -> Registre d'exemples -> Rendu / Validation
"""
