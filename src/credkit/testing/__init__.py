"""Testing – fakes and pytest fixtures for code that depends on credkit."""
