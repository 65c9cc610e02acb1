"""セッションカートパッケージ."""
