#!/usr/bin/env python3

# local imports
from ttt_mcts.commands.versus_command import main

if __name__ == "__main__":
    main()
