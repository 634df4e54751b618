"""
Juicebot - project channel automation for the Juiceworks Discord server

Juicebot registers two slash commands in the Juiceworks guild:

- **/make-channel**: Creates a private text channel for a new project. The
  Juiceworks role can see and write in it; everyone else is denied view.
- **/add-member**: Lets a user into the channel the command is used in and,
  unless they are a service provider, grants them the Project Creator role.

Only members holding the Juiceworks role may use either command.

Usage:
    from juicebot.main import main
    main()  # Connects, registers the commands and runs until SIGINT/SIGTERM
"""
