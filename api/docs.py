# api/docs.py

from http.server import BaseHTTPRequestHandler

HTML = """<!DOCTYPE html>
<html><head>
<meta charset=\"utf-8\"><title>Monkeytype Stats Card</title>
<style>
body { font-family: system-ui, sans-serif; background: #2c2e31; color: #d1d0c5; max-width: 820px; margin: 40px auto; padding: 20px; }
a { color: #e2b714; } code { background: #323437; padding: 2px 6px; border-radius: 4px; }
pre { background: #323437; padding: 16px; border-radius: 6px; overflow-x: auto; }
h1 { border-bottom: 1px solid #646669; padding-bottom: 10px; }
.endpoint { margin: 20px 0; padding: 16px; background: #323437; border-radius: 6px; border-left: 3px solid #e2b714; }
</style>
</head><body>
<h1>Monkeytype Stats Card</h1>
<p>SVG card with a Monkeytype user's personal best. Embed in READMEs or anywhere that renders images.</p>

<div class=\"endpoint\">
<h3>GET <code>/api</code></h3>
<p>Highest WPM and accuracy for one mode and length, skinned with any Monkeytype theme.</p>
<pre>?username=miodec        (or ?user=)
&amp;theme=serika dark      (default: dark)
&amp;mode=time|words        (default: time)
&amp;length=60              (default: 60)
&amp;transparent=true</pre>
</div>

<h3>Example</h3>
<pre>&lt;img src=\"https://your-domain.vercel.app/api?username=miodec&amp;theme=nord\" /&gt;</pre>

<h3>CLI</h3>
<pre>python -m monkeytype_cards -username miodec -theme nord -mode words -length 25</pre>
</body></html>"""


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.end_headers()
        self.wfile.write(HTML.encode())
