"""
PokerLog – Database tooling
=============================
CLI de bootstrap del esquema (crear / resetear / seed).

USO:
    python -m pokerlog.db.bootstrap --reset --seed
"""
