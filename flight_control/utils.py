"""Utility functions for flight control."""


def format_flight_id(sequence: int, prefix: str = "FL", width: int = 3) -> str:
    """
    Format a flight id from its sequence number.
    
    Args:
        sequence: Counter value assigned to the flight
        prefix: Id prefix
        width: Minimum number of digits (zero padded)
        
    Returns:
        Flight id string
        
    Examples:
        >>> format_flight_id(1)
        'FL001'
        >>> format_flight_id(42)
        'FL042'
        >>> format_flight_id(1234)
        'FL1234'
    """
    return f"{prefix}{sequence:0{width}d}"
