from .app import AppProvider
