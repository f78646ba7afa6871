"""cmdy: replay named sets of shell commands in saved directories."""
