"""wgprobe — command-line discovery of WatchGuard wireless access points.

Thin application layer over the standalone ``wgdp`` protocol package:
resolves an interface name to broadcast addresses, runs one discovery
session per address, and prints the results.
"""
