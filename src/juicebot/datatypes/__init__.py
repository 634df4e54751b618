"""Value types shared by the commands and the cogs."""
