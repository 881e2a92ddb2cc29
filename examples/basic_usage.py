"""Example: Building URLs with typed query parameters"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from url_builder import (
    Absolute,
    absolute,
    bool_,
    bracketed_list,
    cross_origin,
    custom,
    float_,
    int_,
    list_,
    maybe,
    non_empty_string,
    relative,
    string,
)

print(absolute(["packages", "elm", "core"], []))
print(relative(["blog", "2019"], [int_("page", 2)]))
print(cross_origin("https://example.com:8042", ["over", "there"], [string("name", "ferret")]))
print(custom(Absolute(), ["packages", "elm", "core"], [], "tutorial"))

max_price = None
print(
    absolute(
        ["products"],
        [
            string("search", "hat"),
            list_(int_, "sizes", [1, 2, 3]),
            bracketed_list(int_, "widths", [4, 5]),
            bool_("discounted", True),
            maybe(float_, "maxprice", max_price),
            non_empty_string("color", ""),
        ],
    )
)
