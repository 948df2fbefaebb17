"""Value types shared by the assertion engine."""
