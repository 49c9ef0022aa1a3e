"""The command interface, the command registry, and file, utility and help commands."""