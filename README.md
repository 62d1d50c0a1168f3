# alchemypath

This package finds the ways to build a Little Alchemy 2 element out of the four
base elements: air, earth, fire and water. The element list, tiers and recipes
are scraped from the community wiki when the server starts. The server then
answers search requests with one or more recipe trees.

A recipe can take part in a tree only if both ingredients can be built and
both are of a strictly lower tier than the element they make.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running the server

```
alchemypath [--host HOST] [--port PORT]
```

By default the server listens on all addresses on port 8080. When it starts,
it fetches the wiki's element page and parses it. If that fails, the command
logs the error and exits with status 1. Once the data is loaded, the server
answers on `/api/data`:

- `OPTIONS` returns an empty `200` response with CORS headers.
- `POST` runs a search. The body must be a JSON object.
- Any other method returns `405` with the text `Only POST allowed`.
- Any other path returns `404`.

A request body looks like this:

```json
{
  "ElementTarget": "brick",
  "AlgorithmType": "bfs",
  "Multiple": true,
  "MaxRecipe": 3
}
```

Keys are matched without regard to case, and unknown keys are ignored. An
empty body, malformed JSON, or a field of the wrong type is answered with
`400` and a plain-text message. `Multiple` is accepted but has no effect on
the search.

`AlgorithmType` takes one of three values:

- `bfs`: breadth-first tree building with a shared cache of trees for each
  element.
- `dfs`: depth-first tree building. An element that is already on the
  current path, or that lies more than 15 levels deep, becomes a leaf.
- `bidirectional`: a backward pass from the base elements records which
  recipes can be reached. A forward build from the target then prefers those
  recipes.

At most `MaxRecipe` trees are built for each element. If the algorithm name is
not recognised, the server still answers `200`, with an empty result whose
`tree` is `null`.

The response is a JSON object:

- `targetElement`: the element searched for. Only the `dfs` search fills this
  in; the other two searches leave it as an empty string.
- `tree`: a list of recipe trees. Each node has `name`, `sources` (the
  ingredient pair, or `null` for a leaf) and `children` (or `null`).
- `nodes`: for `bfs` and `dfs`, the total number of nodes in the returned
  trees. For `bidirectional`, the number of nodes created during the forward
  build.
- `time`: the search time in whole microseconds.

## Using the library

```python
from alchemypath.bfs import main_bfs

recipes = {
    "steam": [["water", "fire"]],
    "mud": [["water", "earth"]],
}
tiers = {"water": 0, "fire": 0, "earth": 0, "air": 0, "steam": 1, "mud": 1}

result = main_bfs(recipes, tiers, "steam", 1)
print(result.to_dict())
```

Each search returns an `alchemypath.model.SearchResult`. It holds
`ElementNode` trees, and `to_dict()` gives the JSON form described above. The
other searches are called the same way:

- `alchemypath.dfs.main_dfs`
- `alchemypath.bidirectional.main_bidirectional_bfs`

The lower-level builders are `build_tree_bfs`, `build_tree_dfs` and
`forward_build_tree` (the last one together with `generate_backward_paths` and
`BidirectionalState`).

To get the element data, use these functions from `alchemypath.scraper`:

- `scrape_alchemy_elements(session=None)` fetches the wiki page and parses it.
  It raises `ScrapeError` on network, status or parse failures.
- `parse_elements(html)` parses HTML you already have.

Both return a dict that maps each element name to an `ElementInfo`, which
holds `tier` and `recipes`. `alchemypath.server.RecipeBook.from_elements`
turns that dict into tables you can search. To run a search without HTTP,
pass a `SearchRequest` to `RecipeBook.search`.

## What it does not do

Scraped data is not saved. Every server start fetches the wiki page again,
and there is no way to load element data from a local file from the command
line.