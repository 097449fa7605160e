"""Classic data structures and algorithms for study: searches, sorts, linked lists,
queues, stacks, trees, grade statistics and an interactive sorting study."""

__version__ = "0.1.0"