"""
Exemples de code du guide.
Un module par pattern, chacun autonome : des classes et un main() qui affiche sa trace.
"""
