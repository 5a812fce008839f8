from flask import Flask, request, jsonify, render_template_string
import logging
import os

from feedback import record_feedback, FEEDBACK_RESET_SECONDS
from url_heuristics import analyze


def _env_flag(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


PORT = int(os.environ.get("PHISHCHECK_PORT", "5001"))
DEBUG = _env_flag("PHISHCHECK_DEBUG")
ANALYSIS_DELAY_MS = int(os.environ.get("PHISHCHECK_ANALYSIS_DELAY_MS", "1500"))
LOG_LEVEL = os.environ.get("PHISHCHECK_LOG_LEVEL", "INFO").upper()


# ---------------------------
# MAIN UI PAGE
# ---------------------------
HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Phishing Website Detector</title>
    <style>
        body { font-family: Arial; background: #f2f2f2; padding: 20px; }
        .container {
            max-width: 700px; margin: auto;
            background: white; padding: 20px;
            border-radius: 10px;
            box-shadow: 0 0 10px #ccc;
        }
        h1, .subtitle { text-align: center; }
        .subtitle { color: #666; }
        input { width: 70%; padding: 10px; }
        button { padding: 10px 15px; }
        .result { margin-top: 20px; padding: 15px; border-radius: 8px; border: 2px solid #ccc; }
        .status { text-transform: capitalize; font-size: 1.3em; font-weight: bold; }
        .badge { margin-left: 10px; padding: 3px 8px; border-radius: 6px; font-size: 0.8em; }
        .safe { border-color: #22c55e; } .safe .badge { background: #dcfce7; color: #166534; }
        .suspicious { border-color: #eab308; } .suspicious .badge { background: #fef9c3; color: #854d0e; }
        .dangerous { border-color: #ef4444; } .dangerous .badge { background: #fee2e2; color: #991b1b; }
        .feedback { margin-top: 15px; padding: 15px; background: #f5f5f5; border-radius: 8px; }
        .thanks { color: #16a34a; font-weight: bold; }
        .error { color: #dc2626; }
        .footer { display: flex; justify-content: space-between; margin-top: 20px; color: #666; }
        .tips { display: flex; gap: 15px; }
        .tips .container { flex: 1; }
        .hidden { display: none; }
    </style>
</head>

<body>

<h1>Phishing Website Detector</h1>
<p class="subtitle">Check if a website is potentially dangerous or attempting to steal your information</p>

<div class="container">
    <h3>URL Analyzer</h3>
    <p>Enter a website URL to check if it's safe to visit</p>

    <input id="url" placeholder="https://example.com" oninput="syncButton()">
    <button id="analyze" onclick="analyzeUrl()" disabled>Analyze</button>
    <p id="error" class="error hidden"></p>

    <div id="result" class="result hidden">
        <div>
            <span id="status" class="status"></span>
            <span id="badge" class="badge"></span>
        </div>
        <p><b id="headline"></b></p>
        <p id="message"></p>
        <ul id="reasons"></ul>

        <div class="feedback">
            <b>Help improve our detection model</b>
            <p>Was our analysis correct? Your feedback helps us improve our detection capabilities.</p>
            <div id="feedback-buttons">
                <button onclick="submitFeedback(true)">Yes, correct analysis</button>
                <button id="dispute" onclick="submitFeedback(false)"></button>
            </div>
            <div id="feedback-thanks" class="thanks hidden">
                Thank you for your feedback! Your contribution helps protect other users.
            </div>
        </div>
    </div>

    <div class="footer">
        <span>Always verify the legitimacy of websites before entering sensitive information</span>
        <button id="visit" class="hidden" onclick="window.open(lastUrl, '_blank')">Visit anyway</button>
    </div>
</div>

<br>

<h3 align="center">Safe Browsing Tips</h3>
<div class="tips">
    <div class="container">
        <b>Check the URL</b>
        <p>Verify the website address. Phishing sites often use URLs that look similar to legitimate sites but with slight variations.</p>
    </div>
    <div class="container">
        <b>Look for HTTPS</b>
        <p>Secure websites use HTTPS and display a padlock icon in the address bar. This indicates encrypted communication.</p>
    </div>
</div>

<script>
const ANALYSIS_DELAY_MS = {{ analysis_delay_ms }};
const FEEDBACK_RESET_MS = {{ feedback_reset_ms }};

const HEADLINES = {
    safe: "This website appears to be safe",
    suspicious: "This website shows some suspicious characteristics",
    dangerous: "This website is likely dangerous"
};

let analyzing = false;
let lastUrl = "";

function syncButton() {
    let btn = document.getElementById("analyze");
    btn.disabled = !document.getElementById("url").value || analyzing;
    btn.textContent = analyzing ? "Analyzing..." : "Analyze";
}

document.getElementById("url").addEventListener("keydown", e => {
    if (e.key === "Enter") analyzeUrl();
});


// -----------------------
// ANALYZE URL
// -----------------------
async function analyzeUrl() {
    let url = document.getElementById("url").value;
    if (!url || analyzing) return;

    analyzing = true;
    syncButton();
    document.getElementById("error").classList.add("hidden");

    try {
        let res = await fetch('/analyze', {
            method: 'POST',
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify({ url })
        });
        if (!res.ok) throw new Error(`Analysis failed (${res.status})`);
        let data = await res.json();

        await new Promise(resolve => setTimeout(resolve, ANALYSIS_DELAY_MS));
        lastUrl = url;
        showResult(data);
    } catch (err) {
        let box = document.getElementById("error");
        box.textContent = err.message || "Analysis failed";
        box.classList.remove("hidden");
    } finally {
        analyzing = false;
        syncButton();
    }
}

function showResult(data) {
    let box = document.getElementById("result");
    box.className = "result " + data.status;

    document.getElementById("status").textContent = data.status;
    document.getElementById("badge").textContent = `Risk Score: ${data.score}/100`;
    document.getElementById("headline").textContent = HEADLINES[data.status];
    document.getElementById("message").textContent = data.status === "safe"
        ? "Our analysis didn't detect common phishing indicators, but always remain cautious."
        : "Our analysis detected the following concerns:";

    let list = document.getElementById("reasons");
    list.innerHTML = "";
    data.reasons.forEach(r => {
        let li = document.createElement("li");
        li.textContent = r;
        list.appendChild(li);
    });

    document.getElementById("dispute").textContent =
        "No, this is " + (data.status === "safe" ? "actually suspicious" : "actually safe");
    document.getElementById("visit").classList.remove("hidden");
}


// -----------------------
// FEEDBACK
// -----------------------
async function submitFeedback(correct) {
    await fetch('/feedback', {
        method: 'POST',
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify({ url: lastUrl, correct })
    });

    document.getElementById("feedback-buttons").classList.add("hidden");
    document.getElementById("feedback-thanks").classList.remove("hidden");
    setTimeout(() => {
        document.getElementById("feedback-buttons").classList.remove("hidden");
        document.getElementById("feedback-thanks").classList.add("hidden");
    }, FEEDBACK_RESET_MS);
}

</script>
</body>
</html>
"""


def create_app(config=None):
    app = Flask(__name__)
    app.config["ANALYSIS_DELAY_MS"] = ANALYSIS_DELAY_MS
    if config:
        app.config.update(config)

    @app.route("/")
    def home():
        return render_template_string(
            HTML,
            analysis_delay_ms=app.config["ANALYSIS_DELAY_MS"],
            feedback_reset_ms=int(FEEDBACK_RESET_SECONDS * 1000),
        )

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    # ---------------------------
    # ANALYZE API
    # ---------------------------
    @app.route("/analyze", methods=["POST"])
    def analyze_url():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        url = data.get("url", "")

        if not isinstance(url, str):
            return jsonify({"error": "URL must be a string"}), 400

        result = analyze(url)

        body = {"url": url}
        body.update(result.to_dict())
        return jsonify(body)

    # ---------------------------
    # FEEDBACK API
    # ---------------------------
    @app.route("/feedback", methods=["POST"])
    def feedback():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        url = data.get("url", "")
        correct = data.get("correct")

        if not url or not isinstance(url, str):
            return jsonify({"error": "Missing URL"}), 400
        if not isinstance(correct, bool):
            return jsonify({"error": "'correct' must be true or false"}), 400

        record_feedback(url, correct)
        return jsonify({"status": "recorded"})

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    app.run(debug=DEBUG, port=PORT)
