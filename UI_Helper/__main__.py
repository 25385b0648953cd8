from .Main import Main

Main()
