"""HTML templates of the web service."""

from jinja2 import DictLoader

LAYOUT = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Genesis Alpha</title>
  <meta name="description" content="Tiny web app to help you form a genesis file">
  <link rel="stylesheet" href="https://unpkg.com/blaze/scss/dist/components.buttons.min.css">
  <link rel="stylesheet" href="https://unpkg.com/blaze/scss/dist/components.inputs.min.css">
  <style>
    body { font-family: serif; font-size: 21px; }
  </style>
</head>
<body>
  <div style="width:40%; margin:0 auto;">
    {% block content %}{% endblock %}
  </div>
</body>
</html>
"""

LIST = """{% extends "layout.html" %}
{% block content %}
<h1>Genesis files</h1>
<ul>
  {% for chain_id in chain_ids %}
  <li><h3><a href="{{ url_for('view', chain_id=chain_id) }}">{{ chain_id }}</a></h3></li>
  {% else %}
  <li><h3>No genesis files :(</h3></li>
  {% endfor %}
</ul>
<a href="{{ url_for('new') }}" class="c-button c-button--info">New</a>
{% endblock %}
"""

VALIDATOR_FIELDS = """
Your Validator PubKey (raw json; output of `tendermint show_validator`){{ suffix }}
<textarea name="validator_pubkey" rows="6" class="c-field"{{ required }}></textarea><br>
Your Validator Power{{ suffix }}
<input type="number" name="validator_power" min="0" class="c-field"{{ required }}><br>
Your Validator Name{{ suffix }}
<input type="text" name="validator_name" class="c-field"{{ required }}><br>
"""

NEW = """{% extends "layout.html" %}
{% block content %}
<h1>New genesis</h1>
<form action="{{ url_for('create') }}" method="POST">
  ChainID (*) <input type="text" name="chainID" class="c-field" required><br>
  {% with suffix=" (optional)", required="" %}{% include "validator_fields.html" %}{% endwith %}
  App Hash (hex) (optional) <input type="text" name="app_hash" class="c-field"><br>
  App State (raw json) (optional) <textarea name="app_state" rows="6" class="c-field"></textarea><br>
  <input type="submit" value="Create" class="c-button c-button--info">
</form>
{% endblock %}
"""

CREATED = """{% extends "layout.html" %}
{% block content %}
<h1>
  Give <a href="{{ url_for('new_validator', chain_id=chain_id) }}">this link</a> to other validators
  &amp;&amp; <a href="{{ url_for('view', chain_id=chain_id) }}">view genesis JSON</a>
</h1>
{% endblock %}
"""

NEW_VALIDATOR = """{% extends "layout.html" %}
{% block content %}
<h1>Add validator to {{ chain_id }}</h1>
<p>{{ validator_count }} validators have checked in so far</p>
<form action="{{ url_for('add_validator', chain_id=chain_id) }}" method="POST">
  {% with suffix="", required=" required" %}{% include "validator_fields.html" %}{% endwith %}
  <input type="submit" value="Add" class="c-button c-button--info">
</form>
{% endblock %}
"""

loader = DictLoader({
    "layout.html": LAYOUT,
    "list.html": LIST,
    "validator_fields.html": VALIDATOR_FIELDS,
    "new.html": NEW,
    "created.html": CREATED,
    "new_validator.html": NEW_VALIDATOR,
})
