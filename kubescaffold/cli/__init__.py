"""
CLI de inspección: compone el core, no contiene lógica propia.
"""
