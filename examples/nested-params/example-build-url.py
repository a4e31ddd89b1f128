# Imports the query builders
from httpbuildquery import build_query, build_url, iter_pairs

# Nested params the way a PHP backend expects them
params = {
    "foo": "bar",
    "user": {
        "name": "Bob",
        "children": [
            {"name": "Bobby"},
            {"name": "John"}
        ]
    }
}

if __name__ == "__main__":
    # foo=bar&user[name]=Bob&user[children][0][name]=Bobby&user[children][1][name]=John
    print(build_query(params))

    # Existing query strings on the base URL are kept
    print(build_url("https://example.com/api/users?page=1", params))

    # Pairs can also be consumed one at a time
    for pair in iter_pairs(params):
        print(pair)
