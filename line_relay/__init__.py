"""LINE webhook relay for robot control commands and chat forwarding."""
