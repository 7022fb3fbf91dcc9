"""HTTP interface for the EP-Expert decision-support engine."""
