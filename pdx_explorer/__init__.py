"""pdx-explorer - index game/mod content trees and resolve localization keys."""

__version__ = "0.1.0"
