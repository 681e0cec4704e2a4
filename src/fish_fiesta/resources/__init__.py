"""
Bundled game data for Fish Fiesta.

``fishes/`` holds one record per creature and ``levels/`` one record per
level. ``fish_fiesta.settings.paths.bundled_data_path`` resolves this
directory.
"""
