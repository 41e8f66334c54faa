#!/usr/bin/env python3
"""
DigitalOcean Resource Manager - Main Entry Point

This is the main entry point for do-manager.
It can be run directly or imported as a module.
"""

from do_manager.cli.main import main

if __name__ == "__main__":
    main()
