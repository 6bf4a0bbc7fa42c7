"""
backoffice.views

Helpers de présentation (sans I/O) : libellés FR et couleurs, vues détail, listes locales.
"""
