"""PRG Convert - command line converter between .prg and .txt programs."""
