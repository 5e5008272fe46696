# Utility functions

# --- Configuration Constants ---
LISTING_HEADER = "Items in Description Order:"

def format_response(data, status_code=200):
    """
    Formats a response object.
    """
    return {
        "statusCode": status_code,
        "data": data
    }

def is_success(response):
    return 200 <= response["statusCode"] < 300

def format_listing(entries):
    """
    Renders (description, location) pairs as the printed inventory listing.
    """
    lines = [LISTING_HEADER]
    for description, location in entries:
        lines.append(f"- {description}: {location}")
    return "\n".join(lines)

if __name__ == "__main__":
    # Example usage
    response = format_response("Success!")
    print(response)
    print(format_listing([("Airpods", "Aisle 1, Shelf 7"), ("Wireless Mouse", "Aisle 2, Shelf 3")]))
