"""
scripts

Package utilitaire pour les scripts d’exploitation du back-office.

Rôle (fonctionnel) :
- seed_demo : jeu de données de démonstration (tous pays ou pays choisis).
- browse : consultation en terminal (listes, vues détail, tableau de bord) via l’API.

Note :
- Les scripts ne contiennent pas de logique métier “centrale” :
  ils orchestrent et appellent les modules de `backoffice/` (services, views, db…).
"""
