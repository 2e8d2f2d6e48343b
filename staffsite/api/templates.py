"""
Fire22 Staff Site — HTML Templates
Layout, shared components and the profile, contact, schedule, directory
and 404 pages. Tools sub-pages live in templates_tools.py.
"""

BASE_CSS = """
:root{--bg:#0a0e27;--sf:#121735;--sf2:#1a2046;--bd:#2a3163;--tx:#e8eaf6;--tx2:#8f96c2;
--gd:#ffd700;--or:#ff6b35;--tq:#40e0d0;--gn:#22c55e;--rd:#ef4444;--pp:#a855f7;--r:12px}
*{margin:0;padding:0;box-sizing:border-box}
body{font-family:'DM Sans',sans-serif;background:var(--bg);color:var(--tx);min-height:100vh;line-height:1.5}
a{color:var(--tq);text-decoration:none}
h1{font-size:28px;font-weight:700;margin-bottom:8px}
h2{font-size:20px;font-weight:700;margin-bottom:6px}
h3{font-size:15px;font-weight:600;margin-bottom:6px}
.hdr{background:var(--sf);border-bottom:2px solid var(--bd);padding:12px 28px;display:flex;justify-content:space-between;align-items:center;flex-wrap:wrap;gap:12px;min-height:64px}
.hdr-id{display:flex;align-items:center;gap:12px;color:var(--tx)}
.hdr-id small{display:block;color:var(--tx2);font-size:11px}
.hdr-logo{font-weight:700;color:var(--or);margin-right:8px}
.hdr-nav{display:flex;gap:6px;flex-wrap:wrap}
.hdr-btn{padding:6px 14px;font-size:12px;font-weight:600;border-radius:6px;border:1px solid var(--bd);background:var(--sf2);color:var(--tx);transition:.15s;display:inline-flex;align-items:center;gap:4px}
.hdr-btn:hover{border-color:var(--tq);color:#fff}
.hdr-active{border-color:var(--gd);background:rgba(255,215,0,.1)}
.avatar{width:38px;height:38px;border-radius:50%;display:inline-flex;align-items:center;justify-content:center;background:var(--sf2);border:2px solid var(--tq);font-weight:700;font-size:13px}
.avatar-vip{border-color:var(--gd);box-shadow:0 0 10px rgba(255,215,0,.4)}
.tier-badge{padding:3px 10px;border-radius:16px;font-size:10px;font-weight:700;text-transform:uppercase;letter-spacing:.5px;background:rgba(64,224,208,.12);color:var(--tq)}
.tier-5{background:rgba(255,215,0,.15);color:var(--gd)}
.tier-4{background:rgba(255,107,53,.15);color:var(--or)}
.ctr{max-width:1400px;margin:0 auto;padding:24px 28px}
.sec{margin:28px 0}
.sec-h{margin-bottom:16px}.sec-h p{color:var(--tx2);font-size:13px}
.grid{display:grid;gap:14px;grid-template-columns:repeat(auto-fit,minmax(240px,1fr))}
.card{background:var(--sf);border:1px solid var(--bd);border-radius:var(--r);padding:20px}
.card p{color:var(--tx2);font-size:13px}
.card-t{font-size:11px;font-weight:600;color:var(--tx2);text-transform:uppercase;letter-spacing:1px;margin-bottom:10px}
.badge{padding:3px 9px;border-radius:16px;font-size:10px;font-weight:600;text-transform:uppercase;letter-spacing:.5px;background:rgba(64,224,208,.12);color:var(--tq)}
.b-gd{background:rgba(255,215,0,.15);color:var(--gd)}
.b-gn{background:rgba(34,197,94,.15);color:var(--gn)}
.b-or{background:rgba(255,107,53,.15);color:var(--or)}
.b-rd{background:rgba(239,68,68,.15);color:var(--rd)}
.tag{display:inline-block;padding:2px 8px;margin:2px;border-radius:6px;font-size:11px;background:var(--sf2);color:var(--tx2)}
.btn{padding:10px 18px;border-radius:8px;border:1px solid var(--bd);font-weight:600;font-size:13px;cursor:pointer;display:inline-flex;align-items:center;gap:6px;background:var(--sf2);color:var(--tx);transition:.15s}
.btn:hover{border-color:var(--tq)}
.btn-p{background:linear-gradient(135deg,var(--or),#f7931e);border-color:var(--or);color:#fff}
.btn-g{background:linear-gradient(135deg,var(--gd),#ffb300);border-color:var(--gd);color:#1a1a1a}
.btn-s{background:var(--sf2)}
.btn-danger{background:rgba(239,68,68,.15);border-color:var(--rd);color:var(--rd)}
.actions{display:flex;gap:10px;flex-wrap:wrap}
.stats{display:grid;grid-template-columns:repeat(auto-fit,minmax(160px,1fr));gap:12px}
.stat{background:var(--sf2);border-radius:10px;padding:14px;text-align:center}
.stat-v{font-size:24px;font-weight:700;font-family:'JetBrains Mono',monospace;color:var(--gd)}
.stat-l{font-size:10px;color:var(--tx2);text-transform:uppercase;letter-spacing:.5px}
.up{color:var(--gn)}.down{color:var(--tq)}
.tbl{width:100%;border-collapse:collapse;font-size:13px}
.tbl th{text-align:left;padding:8px 10px;font-size:10px;color:var(--tx2);text-transform:uppercase;letter-spacing:.5px;border-bottom:1px solid var(--bd)}
.tbl td{padding:10px;border-bottom:1px solid rgba(42,49,99,.5)}
.tool-grid{display:grid;gap:14px;grid-template-columns:repeat(auto-fill,minmax(260px,1fr));margin-top:16px}
.tool-card{background:var(--sf);border:1px solid var(--bd);border-radius:var(--r);padding:20px;color:var(--tx);transition:.15s;display:block}
.tool-card:hover{border-color:var(--gd);transform:translateY(-2px)}
.tool-soon{opacity:.6}
.tool-soon:hover{border-color:var(--bd);transform:none}
.tool-icon{font-size:28px;margin-bottom:8px}
.tool-card p{color:var(--tx2);font-size:13px;margin-bottom:8px}
.empty{padding:28px;text-align:center;color:var(--tx2)}
.ftr{border-top:1px solid var(--bd);padding:20px 28px;text-align:center;color:var(--tx2);font-size:12px;margin-top:40px}
.ftr a{margin:0 8px}
.toast{position:fixed;bottom:24px;right:24px;padding:12px 18px;border-radius:8px;background:var(--sf2);border:1px solid var(--bd);font-size:13px;z-index:100;opacity:0;transition:.2s}
.toast-show{opacity:1}
.toast-success{border-color:var(--gn)}.toast-error{border-color:var(--rd)}
@media(max-width:720px){.ctr{padding:16px}.hdr{padding:12px 16px}}
"""

# ═══════════════════════════════════════════════════════════════════════
# Components
# ═══════════════════════════════════════════════════════════════════════

HTML_HEAD = """<!DOCTYPE html>
<html lang="en"><head><meta charset="utf-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>{{ title }}</title>
<meta name="description" content="{{ description }}">
<link href="https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600;700&family=JetBrains+Mono:wght@400;500&display=swap" rel="stylesheet">
<style>{{ base_css }}</style></head><body>"""

HEADER = """<header class="hdr">
 <a href="/profile" class="hdr-id">
  <span class="hdr-logo">🔥 Fire22</span>
  <span class="avatar{% if is_vip %} avatar-vip{% endif %}">{{ initials }}</span>
  <span><b>{{ employee.name }}</b><small>{{ employee.title }} · {{ employee.department }}</small></span>
 </a>
 <nav class="hdr-nav">
 {% for href, icon, label in nav_links %}
  <a href="{{ href }}" class="hdr-btn{% if active_path == href %} hdr-active{% endif %}">{{ icon }} {{ label }}</a>
 {% endfor %}
 </nav>
 <span class="tier-badge tier-{{ employee.tier }}">Tier {{ employee.tier }}</span>
</header>"""

FOOTER = """<footer class="ftr">
 <div>🔥 Fire22 Staff Directory</div>
 <div style="margin-top:6px"><a href="/profile">Profile</a><a href="/contact">Contact</a><a href="/api/health">Status</a></div>
</footer>"""

ACTION_BUTTONS = """<div class="actions">
{% for b in buttons %}
 {% if b.message %}
 <button type="button" class="btn {{ b.class_name or 'btn-s' }}" data-message="{{ b.message }}">{{ b.icon }} {{ b.label }}</button>
 {% else %}
 <a href="{{ b.href }}" class="btn {{ b.class_name or 'btn-s' }}">{{ b.icon }} {{ b.label }}</a>
 {% endif %}
{% endfor %}
</div>"""

TOOL_CARDS = """{% if tools %}<div class="tool-grid">
{% for t in tools %}
 {% if t.url %}<a href="{{ t.url }}" class="tool-card">{% else %}<div class="tool-card tool-soon">{% endif %}
  <div class="tool-icon">{{ t.icon }}</div>
  <h3>{{ t.name }}</h3>
  <p>{{ t.description }}</p>
  {% if t.min_tier and t.min_tier > 1 %}<span class="badge{% if t.min_tier == 5 %} b-gd{% endif %}">Tier {{ t.min_tier }}+</span>{% endif %}
  {% if not t.url %}<span class="badge">Coming soon</span>{% endif %}
 {% if t.url %}</a>{% else %}</div>{% endif %}
{% endfor %}
</div>{% else %}<div class="empty">No tools are available for this department yet.</div>{% endif %}"""

# Page shell. Content is spliced between LAYOUT_OPEN and LAYOUT_CLOSE
# before rendering, so page templates share one Jinja pass.
LAYOUT_OPEN = """{{ head }}
{{ header }}
<main class="{{ main_class }}">
"""

LAYOUT_CLOSE = """
</main>
{{ footer }}
<div id="toast" class="toast"></div>
<script>
function showNotification(msg, type){
 var t=document.getElementById('toast');
 t.textContent=msg;t.className='toast toast-show toast-'+(type||'info');
 clearTimeout(t._h);t._h=setTimeout(function(){t.className='toast'},3000);
}
function copyToClipboard(text, label){
 if(!navigator.clipboard){showNotification('Copy not supported','error');return;}
 navigator.clipboard.writeText(text).then(function(){showNotification((label||'Value')+' copied','success')},
  function(){showNotification('Copy failed','error')});
}
document.addEventListener('click', function(e){
 var c=e.target.closest('[data-copy]');
 if(c){copyToClipboard(c.dataset.copy, c.dataset.label);return;}
 var m=e.target.closest('[data-message]');
 if(m){alert(m.dataset.message);return;}
 var s=e.target.closest('[data-scroll]');
 if(s){var el=document.getElementById(s.dataset.scroll);if(el)el.scrollIntoView({behavior:'smooth'});}
});
</script>
</body></html>"""

# ═══════════════════════════════════════════════════════════════════════
# Contact
# ═══════════════════════════════════════════════════════════════════════

PAGE_CONTACT = """
<style>
.c-hero{background:linear-gradient(135deg,rgba(255,107,53,.15),rgba(64,224,208,.08));border:1px solid var(--bd);border-radius:16px;padding:32px;margin-bottom:24px}
.c-hero-sub{color:var(--tx2);font-size:13px;display:flex;align-items:center;gap:8px;margin-bottom:18px}
.pulse-dot{width:8px;height:8px;border-radius:50%;background:var(--gn);box-shadow:0 0 8px var(--gn)}
.c-exec{display:flex;align-items:center;gap:16px;margin:18px 0}
.c-exec-av{width:64px;height:64px;border-radius:50%;display:flex;align-items:center;justify-content:center;font-size:28px;background:var(--sf2);border:2px solid var(--gd)}
.c-exec .title{color:var(--gd);font-weight:600}.c-exec .dept{color:var(--tx2);font-size:13px}
.summary{display:grid;grid-template-columns:repeat(auto-fit,minmax(220px,1fr));gap:10px;margin-bottom:16px}
.summary-item{display:flex;align-items:center;gap:10px;background:var(--sf2);border-radius:10px;padding:10px 14px}
.summary-item .lbl{font-size:10px;color:var(--tx2);text-transform:uppercase}
.summary-item .val{font-family:'JetBrains Mono',monospace;font-size:13px}
.copy-btn{margin-left:auto;background:none;border:none;cursor:pointer;font-size:16px}
.method{position:relative}
.method.primary{border-color:rgba(255,215,0,.5)}
.method-h{display:flex;justify-content:space-between;align-items:center;margin-bottom:10px}
.method-icon{font-size:26px}
.method-val{font-family:'JetBrains Mono',monospace;font-size:13px;margin:4px 0 8px;word-break:break-all}
.tabs{display:flex;gap:6px;flex-wrap:wrap;margin-bottom:14px}
.tab-btn{padding:8px 14px;border-radius:8px;border:1px solid var(--bd);background:var(--sf2);color:var(--tx);cursor:pointer;font-size:13px;font-weight:600}
.tab-btn.active{border-color:var(--gd);background:rgba(255,215,0,.1)}
.tab-btn.vip{color:var(--gd)}
.form-tab{display:none}.form-tab.active{display:block}
.f-row{display:grid;grid-template-columns:repeat(auto-fit,minmax(220px,1fr));gap:12px}
.f-group{margin-bottom:12px;display:flex;flex-direction:column;gap:4px}
.f-group label{font-size:12px;color:var(--tx2)}
.f-group input,.f-group select,.f-group textarea{padding:10px 12px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx);font-size:14px;font-family:inherit}
.vip-banner{display:flex;gap:12px;align-items:center;padding:12px 16px;border-radius:10px;background:rgba(255,215,0,.08);border:1px solid rgba(255,215,0,.3);margin-bottom:14px}
.status-dot{width:8px;height:8px;border-radius:50%;display:inline-block;margin-right:6px}
.st-online{background:var(--gn)}.st-busy{background:var(--or)}
.hour-card.available{border-color:rgba(34,197,94,.4)}
.hour-card.unavailable{opacity:.55}
.vip-hours{border:1px solid rgba(255,215,0,.4);background:rgba(255,215,0,.06);border-radius:var(--r);padding:20px;margin:16px 0}
.guarantee.priority{border-color:rgba(255,107,53,.5)}.guarantee.vip{border-color:rgba(255,215,0,.5)}
</style>

<section class="c-hero" id="contact-hero">
 <h1>🏢 Enterprise Communication Hub</h1>
 <div class="c-hero-sub"><span class="pulse-dot"></span><span>24/7 Enterprise Support &amp; API Integration</span></div>
 <div class="c-exec">
  <div class="c-exec-av">{% if is_vip %}👑{% else %}{{ initials }}{% endif %}</div>
  <div>
   <h2>{{ sanitize(employee.name) }}</h2>
   <div class="title">{{ sanitize(employee.title) }}</div>
   <div class="dept">{{ sanitize(employee.department) }}</div>
  </div>
 </div>
 <div class="stats" style="margin-bottom:18px">
 {% for s in hero_stats %}
  <div class="stat"><div class="stat-v">{{ s.value }}</div><div class="stat-l">{{ s.label }}</div></div>
 {% endfor %}
 </div>
 <p style="color:var(--tx2);margin-bottom:18px">From API integration support to live assistance, reach the right person for your request.</p>
 <div class="actions">
  <button type="button" class="btn btn-p" data-scroll="live-support">💬 Start Live Chat</button>
  <button type="button" class="btn btn-s" data-scroll="api-integration">🔌 API Integration</button>
  <button type="button" class="btn btn-g" data-scroll="contact-forms">📝 Contact Forms</button>
 </div>
</section>

<section class="sec" id="contact-methods">
 <div class="sec-h"><h2>📱 Enterprise Contact Channels</h2><p>Multiple ways to reach {{ employee.name }} with guaranteed response times</p></div>
 <div class="summary">
 {% for item in summary %}
  <div class="summary-item">
   <span>{{ item.icon }}</span>
   <div><div class="lbl">{{ item.label }}</div><div class="val">{{ item.value }}</div></div>
   <button type="button" class="copy-btn" data-copy="{{ item.value }}" data-label="{{ item.label }}" title="Copy {{ item.label }}">📋</button>
  </div>
 {% endfor %}
 </div>
 <div class="grid">
 {% for m in methods %}
  <div class="card method {{ 'primary' if m.primary else 'secondary' }} {{ m.category }}">
   <div class="method-h">
    <span class="method-icon">{{ m.icon }}</span>
    <span>
     <span class="badge {{ 'b-gn' if m.availability == '24/7' else '' }}">{{ m.availability }}</span>
     {% if m.primary %}<span class="badge b-gd">Priority</span>{% endif %}
    </span>
   </div>
   <h3>{{ m.title }}</h3>
   <div class="method-val">{{ m.value }}</div>
   <p>{{ m.description }}</p>
   <div class="actions" style="margin-top:12px">
    <a href="{{ m.action }}" class="btn btn-p">Contact Now →</a>
    <button type="button" class="btn btn-s" data-copy="{{ m.value }}" data-label="{{ m.title }}">📋 Copy</button>
   </div>
  </div>
 {% endfor %}
 </div>
 <div class="grid" style="margin-top:14px">
  <div class="card"><h3>⚡ Response Guarantee</h3><p>Priority channels: &lt; 2 hours · Standard: &lt; 4 hours · Business hours only</p></div>
  <div class="card"><h3>🔒 Secure Communication</h3><p>All channels are encrypted and monitored for security compliance</p></div>
 </div>
</section>

<section class="sec" id="support-channels">
 <div class="sec-h"><h2>🚀 Primary Communication Channels</h2><p>Choose the channel that fits your request</p></div>
 <div class="grid">
 {% for ch in support_channels %}
  <div class="card">
   <div class="tool-icon">{{ ch.icon }}</div>
   <h3>{{ ch.title }}</h3>
   <p>{{ ch.description }}</p>
   <div style="margin:10px 0">{% for f in ch.features %}<span class="tag">{{ f }}</span>{% endfor %}</div>
   <button type="button" class="btn btn-s" data-scroll="{{ ch.target }}">Open →</button>
  </div>
 {% endfor %}
 </div>
 <div class="card" style="margin-top:14px">
  <div class="card-t">💡 Additional Support Options</div>
  <div class="grid">
  {% for o in support_options %}<div><h3>{{ o.icon }} {{ o.title }}</h3><p>{{ o.description }}</p></div>{% endfor %}
  </div>
 </div>
</section>

<section class="sec" id="api-integration">
 <div class="sec-h"><h2>🔌 API Integration Center</h2><p>Everything needed to integrate with the Fire22 platform</p></div>
 <div class="grid">
 {% for r in api_resources %}
  <div class="card">
   <div class="tool-icon">{{ r.icon }}</div>
   <h3>{{ r.title }}</h3>
   <p>{{ r.description }}</p>
   <a href="{{ r.href }}" class="btn btn-s" style="margin-top:10px">{{ r.label }}</a>
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="contact-forms">
 <div class="sec-h"><h2>📝 Advanced Contact Forms</h2><p>Specialized forms for different types of inquiries and support requests</p></div>
 <div class="tabs">
 {% for f in forms %}
  <button type="button" class="tab-btn{% if loop.first %} active{% endif %}{% if f.vip %} vip{% endif %}" data-tab="{{ f.id }}">{{ f.label }}</button>
 {% endfor %}
 </div>
 {% for f in forms %}
 <div class="form-tab card{% if loop.first %} active{% endif %}" id="{{ f.id }}-form">
  <h3>{{ f.icon }} {{ f.title }}</h3>
  <p style="margin-bottom:14px">{{ f.description }}</p>
  {% if f.vip %}
  <div class="vip-banner"><span style="font-size:24px">👑</span><div><b>Priority Support Guaranteed</b><p>Your inquiry goes straight to the executive team</p></div></div>
  {% endif %}
  <form class="contact-form" data-form-type="{{ f.id }}">
   <div class="f-row">
   {% for field in f.fields %}
    <div class="f-group"{% if field.type == 'textarea' %} style="grid-column:1/-1"{% endif %}>
     <label for="{{ f.id }}-{{ field.name }}">{{ field.label }}{% if field.required %} *{% endif %}</label>
     {% if field.type == 'select' %}
     <select id="{{ f.id }}-{{ field.name }}" name="{{ field.name }}">
      {% for value, text in field.options %}<option value="{{ value }}">{{ text }}</option>{% endfor %}
     </select>
     {% elif field.type == 'textarea' %}
     <textarea id="{{ f.id }}-{{ field.name }}" name="{{ field.name }}" rows="5"{% if field.required %} required{% endif %}{% if field.placeholder %} placeholder="{{ field.placeholder }}"{% endif %}></textarea>
     {% else %}
     <input type="{{ field.type }}" id="{{ f.id }}-{{ field.name }}" name="{{ field.name }}"{% if field.required %} required{% endif %}{% if field.placeholder %} placeholder="{{ field.placeholder }}"{% endif %}>
     {% endif %}
    </div>
   {% endfor %}
   </div>
   <div class="actions">
    <button type="submit" class="btn {{ 'btn-g' if f.vip else 'btn-p' }}">{{ '👑 Submit VIP Request' if f.vip else '📤 Send Message' }}</button>
    <button type="button" class="btn btn-s" data-draft="{{ f.id }}">💾 Save Draft</button>
   </div>
  </form>
 </div>
 {% endfor %}
</section>

<section class="sec" id="live-support">
 <div class="sec-h"><h2>💬 Live Support Center</h2><p>Real-time assistance across chat, video, phone and remote sessions</p></div>
 <div class="grid">
 {% for o in live_support %}
  <div class="card">
   <div class="tool-icon">{{ o.icon }}</div>
   <h3>{{ o.title }}</h3>
   <p>{{ o.description }}</p>
   <div style="margin-top:10px;font-size:12px"><span class="status-dot st-{{ o.status }}"></span>{{ o.status|capitalize }} · Wait {{ o.wait }}</div>
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="support-tickets">
 <div class="sec-h"><h2>🎫 Support Ticket System</h2><p>Track open requests and service levels</p></div>
 <div class="card" style="padding:0;overflow-x:auto">
  <table class="tbl">
   <thead><tr><th>Ticket</th><th>Subject</th><th>Status</th><th>Priority</th><th>Updated</th></tr></thead>
   <tbody>
   {% for t in tickets %}
    <tr><td style="font-family:'JetBrains Mono',monospace">{{ t.id }}</td><td>{{ t.subject }}</td>
     <td><span class="badge {{ {'open': 'b-or', 'in-progress': 'b-gd', 'resolved': 'b-gn'}[t.status] }}">{{ t.status }}</span></td>
     <td>{{ t.priority }}</td><td style="color:var(--tx2)">{{ t.updated }}</td></tr>
   {% endfor %}
   </tbody>
  </table>
 </div>
 <div class="card" style="margin-top:14px">
  <div class="card-t">⏱️ Service Level Agreements</div>
  <table class="tbl">
   <thead><tr><th>Priority</th><th>First Response</th><th>Resolution</th></tr></thead>
   <tbody>{% for s in sla_levels %}<tr><td>{{ s.name }}</td><td>{{ s.response }}</td><td>{{ s.resolution }}</td></tr>{% endfor %}</tbody>
  </table>
 </div>
</section>

<section class="sec" id="business-hours">
 <div class="sec-h"><h2>🕒 Support Hours &amp; Availability</h2><p>Support schedule across all channels</p></div>
 <div class="grid">
 {% for h in hours %}
  <div class="card hour-card available">
   <div class="method-h"><h3>{{ h.day }}</h3><span class="badge b-gn">✓ Available</span></div>
   <div style="font-family:'JetBrains Mono',monospace">{{ h.hours }}</div>
   <p>{{ h.note }}</p>
  </div>
 {% endfor %}
 </div>
 {% if is_vip %}
 <div class="vip-hours-notice vip-hours">
  <h3>👑 24/7 VIP Support</h3>
  <p>As a VIP Management executive, {{ employee.name }} provides round-the-clock support for critical client matters and urgent business needs.</p>
  <div class="actions" style="margin-top:10px">
   <span class="tag">📞 Direct VIP Line: {{ vip.hotline }}</span>
   <span class="tag">✈️ Emergency Telegram: {{ vip.telegram }}</span>
  </div>
 </div>
 {% endif %}
 <div class="card" style="margin-top:14px">
  <div class="card-t">⚡ Response Time Guarantee</div>
  <div class="grid">
  {% for g in guarantees %}
   <div class="card guarantee {{ g.css }}"><h3>{{ g.name }}</h3><div class="stat-v">{{ g.response }}</div><p>{{ g.description }}</p></div>
  {% endfor %}
  </div>
 </div>
 <p style="color:var(--tx2);font-size:12px;margin-top:12px">🌍 All times shown in Eastern Time (ET). Urgent matters are handled through the emergency channels.</p>
</section>

<script>
document.querySelectorAll('.tab-btn').forEach(function(btn){
 btn.addEventListener('click', function(){
  var tab=btn.dataset.tab;
  document.querySelectorAll('.tab-btn').forEach(function(b){b.classList.toggle('active', b===btn)});
  document.querySelectorAll('.form-tab').forEach(function(f){f.classList.toggle('active', f.id===tab+'-form')});
 });
});
document.querySelectorAll('[data-draft]').forEach(function(btn){
 btn.addEventListener('click', function(){
  var form=btn.closest('form');
  localStorage.setItem('draft-'+btn.dataset.draft, JSON.stringify(Object.fromEntries(new FormData(form))));
  showNotification('Draft saved','success');
 });
});
document.querySelectorAll('form.contact-form').forEach(function(form){
 form.addEventListener('submit', function(e){
  e.preventDefault();
  var type=form.dataset.formType;
  var btn=form.querySelector('button[type=submit]');
  btn.disabled=true;
  fetch('/api/contact/'+type, {method:'POST', headers:{'Content-Type':'application/json'},
   body:JSON.stringify(Object.fromEntries(new FormData(form)))})
  .then(function(r){return r.json().then(function(d){return [r.ok, d]})})
  .then(function(res){
   if(res[0]){showNotification('Message sent. Reference '+res[1].id,'success');form.reset();localStorage.removeItem('draft-'+type);}
   else{showNotification((res[1].errors||[res[1].error||'Submission failed']).join('; '),'error');}
  })
  .catch(function(){showNotification('Network error, please try again','error')})
  .finally(function(){btn.disabled=false});
 });
});
</script>
"""

# ═══════════════════════════════════════════════════════════════════════
# Profile
# ═══════════════════════════════════════════════════════════════════════

PAGE_PROFILE = """
<style>
.p-hero{background:linear-gradient(135deg,rgba(255,215,0,.12),rgba(255,107,53,.08));border:1px solid var(--bd);border-radius:16px;padding:32px;margin-bottom:24px}
.p-badge{display:inline-flex;gap:6px;align-items:center;padding:4px 12px;border-radius:16px;background:rgba(255,215,0,.12);color:var(--gd);font-size:12px;font-weight:600;margin-bottom:12px}
.p-name{font-size:34px}
.p-title{color:var(--gd);font-weight:600;margin-bottom:10px}
.p-bio{color:var(--tx2);max-width:760px;margin-bottom:14px}
.cred{display:inline-block;padding:4px 10px;margin:3px;border-radius:6px;border:1px solid var(--bd);font-size:12px}
.tl-item{border-left:2px solid var(--gd);padding:0 0 18px 18px;position:relative}
.tl-item:before{content:'';position:absolute;left:-7px;top:2px;width:12px;height:12px;border-radius:50%;background:var(--gd)}
.tl-year{font-family:'JetBrains Mono',monospace;color:var(--gd);font-size:12px}
.tl-co{color:var(--tq);font-size:12px;margin-bottom:4px}
.metric-h{display:flex;justify-content:space-between;align-items:center}
.stars{color:var(--gd);letter-spacing:2px}
.cert-active{color:var(--gn)}.cert-completed{color:var(--tq)}
</style>

<section class="p-hero" id="profile-hero">
 <div class="p-badge">{% if is_vip %}👑 VIP Management Executive{% else %}🔥 {{ employee.department }}{% endif %}</div>
 <h1 class="p-name">{{ sanitize(employee.name) }}</h1>
 <div class="p-title">{{ sanitize(employee.title) }}</div>
 <p class="p-bio">{{ employee.bio or default_bio }}</p>
 <div class="credentials" style="margin-bottom:18px">{% for c in credentials %}<span class="cred">{{ c }}</span>{% endfor %}</div>
 <div class="stats" style="margin-bottom:18px">
 {% for s in hero_stats %}
  <div class="stat"><div class="stat-v">{{ s.value }}</div><div class="stat-l">{{ s.label }}</div></div>
 {% endfor %}
 </div>
 {{ hero_actions }}
</section>

<section class="sec" id="achievements">
 <div class="sec-h"><h2>🏆 Achievements &amp; Recognition</h2><p>Highlights of recent performance</p></div>
 <div class="grid">
 {% for a in achievements %}
  <div class="card"><div class="tool-icon">{{ a.icon }}</div><h3>{{ a.title }}</h3><p>{{ a.description }}</p><span class="badge" style="margin-top:8px">{{ a.year }}</span></div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="timeline">
 <div class="sec-h"><h2>🚀 Professional Journey</h2><p>Career progression and key milestones</p></div>
 <div class="card">
 {% for item in timeline %}
  <div class="tl-item">
   <div class="tl-year">{{ item.year }}</div>
   <h3>{{ item.title }}</h3>
   <div class="tl-co">{{ item.company }}</div>
   <p>{{ item.description }}</p>
   {% for a in item.achievements %}<div style="font-size:13px">✓ {{ a }}</div>{% endfor %}
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="services">
 <div class="sec-h"><h2>{% if is_vip %}🔥 VIP Management Services{% else %}🔧 Services &amp; Tools{% endif %}</h2><p>What {{ employee.name }} can help with</p></div>
 <div class="grid">
 {% for s in services %}
  <div class="card">
   <h3>{{ s.icon }} {{ s.title }}</h3>
   <p>{{ s.description }}</p>
   <div style="margin-top:8px">{% for f in s.features %}<span class="tag">{{ f }}</span>{% endfor %}</div>
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="performance">
 <div class="sec-h"><h2>📊 Performance Metrics</h2><p>Key indicators at a glance</p></div>
 <div class="grid">
 {% for m in metrics %}
  <div class="card">
   <div class="metric-h"><span style="font-size:22px">{{ m.icon }}</span><span class="{{ m.trend }}">{{ m.change }}</span></div>
   <div class="stat-v" style="margin-top:6px">{{ m.value }}</div>
   <div class="stat-l">{{ m.label }}</div>
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="client-success">
 <div class="sec-h"><h2>🏆 {{ 'Client' if is_vip else 'Team' }} Success Stories</h2><p>Results delivered</p></div>
 <div class="grid">
 {% for s in success_stories %}
  <div class="card"><h3>{{ s.client }}</h3><span class="badge b-gd">{{ s.achievement }}</span>
   <div style="color:var(--tq);font-size:12px;margin:8px 0">{{ s.timeframe }}</div><p>{{ s.description }}</p></div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="testimonials">
 <div class="sec-h"><h2>💬 Testimonials</h2><p>What people say about working with {{ employee.name }}</p></div>
 <div class="grid">
 {% for t in testimonials %}
  <div class="card">
   <div class="metric-h"><b>{{ t.avatar }} {{ t.client }}</b><span class="stars">{{ '★' * t.rating }}</span></div>
   <p style="margin:10px 0">&ldquo;{{ t.text }}&rdquo;</p>
   <div style="font-size:12px">🎯 {{ t.result }}</div>
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="recognition">
 <div class="sec-h"><h2>🌟 Industry Recognition</h2><p>Professional accolades</p></div>
 <div class="grid">
 {% for r in recognitions %}
  <div class="card"><div class="tool-icon">{{ r.icon }}</div><h3>{{ r.title }}</h3>
   <div style="color:var(--tq);font-size:12px">{{ r.issuer }} • {{ r.year }}</div><p>{{ r.description }}</p></div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="certifications">
 <div class="sec-h"><h2>🎓 Professional Certifications</h2><p>Credentials and professional development</p></div>
 <div class="grid">
 {% for c in certifications %}
  <div class="card"><div class="metric-h"><h3>{{ c.title }}</h3><span class="cert-{{ c.status|lower }}">{{ c.status }}</span></div>
   <p>{{ c.issuer }}</p><div class="tl-year">{{ c.year }}</div></div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="connect">
 <div class="sec-h"><h2>📞 Connect &amp; Schedule</h2><p>Ways to get in touch</p></div>
 <div class="grid">
  {% if can_schedule %}<div class="card"><div class="tool-icon">📅</div><h3>{{ 'Schedule VIP Consultation' if is_vip else 'Schedule a Meeting' }}</h3><p>Book time directly on the calendar</p><a href="/schedule" class="btn btn-p" style="margin-top:10px">Book Now</a></div>{% endif %}
  <div class="card"><div class="tool-icon">📧</div><h3>Direct Contact</h3><p>{{ employee.email }}</p><a href="/contact" class="btn btn-s" style="margin-top:10px">Send Message</a></div>
  {% if is_vip %}
  <div class="card"><div class="tool-icon">🚨</div><h3>Emergency Support</h3><p>24/7 priority line: {{ vip.hotline }}</p><a href="tel:{{ vip.hotline }}" class="btn btn-danger" style="margin-top:10px">Emergency Hotline</a></div>
  {% endif %}
 </div>
 {% if employee.manager or direct_reports %}
 <div class="card" style="margin-top:14px">
  <div class="card-t">Team</div>
  {% if employee.manager %}<p>Reports to <b>{{ employee.manager }}</b></p>{% endif %}
  {% if direct_reports %}<p>Direct reports: {% for r in direct_reports %}<span class="tag">{{ r }}</span>{% endfor %}</p>{% endif %}
 </div>
 {% endif %}
</section>
"""

# ═══════════════════════════════════════════════════════════════════════
# Schedule
# ═══════════════════════════════════════════════════════════════════════

PAGE_SCHEDULE = """
<div class="sec-h"><h1>📅 Schedule with {{ sanitize(employee.name) }}</h1><p>{{ employee.title }} · {{ employee.department }}</p></div>

<section class="sec" id="availability">
 <div class="card-t">Weekly Availability</div>
 <div class="grid">
 {% for h in week %}
  <div class="card hour-card {{ 'available' if h.available else 'unavailable' }}">
   <h3>{{ h.day }}</h3>
   <div style="font-family:'JetBrains Mono',monospace">{{ h.hours if h.available else 'Unavailable' }}</div>
   {% if h.available %}<span class="badge b-gn" style="margin-top:8px">✓ Available</span>{% else %}<span class="badge b-rd" style="margin-top:8px">✗ Unavailable</span>{% endif %}
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="meeting-types">
 <div class="card-t">Meeting Types</div>
 <div class="grid">
 {% for m in meeting_types %}
  <div class="card{% if m.id == 'vip' %} vip-consultation{% endif %}">
   <div class="tool-icon">{{ m.icon }}</div>
   <h3>{{ m.name }}</h3>
   <p>{{ m.description }}</p>
   <span class="badge" style="margin-top:8px">{{ m.duration }} min</span>
  </div>
 {% endfor %}
 </div>
</section>

<section class="sec" id="booking">
 <div class="card">
  <h3>Request a Meeting</h3>
  <p style="margin-bottom:14px">Requests are confirmed by email within one business day.</p>
  <form id="booking-form">
   <div style="display:grid;grid-template-columns:repeat(auto-fit,minmax(220px,1fr));gap:12px">
    <label style="display:flex;flex-direction:column;gap:4px;font-size:12px;color:var(--tx2)">Your Name *
     <input name="name" required style="padding:10px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx)"></label>
    <label style="display:flex;flex-direction:column;gap:4px;font-size:12px;color:var(--tx2)">Email *
     <input name="email" type="email" required style="padding:10px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx)"></label>
    <label style="display:flex;flex-direction:column;gap:4px;font-size:12px;color:var(--tx2)">Meeting Type
     <select name="meeting" style="padding:10px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx)">
     {% for m in meeting_types %}<option value="{{ m.name }}">{{ m.name }} ({{ m.duration }} min)</option>{% endfor %}
     </select></label>
    <label style="display:flex;flex-direction:column;gap:4px;font-size:12px;color:var(--tx2)">Preferred Day
     <select name="day" style="padding:10px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx)">
     {% for h in week if h.available %}<option>{{ h.day }}</option>{% endfor %}
     </select></label>
   </div>
   <label style="display:flex;flex-direction:column;gap:4px;font-size:12px;color:var(--tx2);margin:12px 0">Agenda *
    <textarea name="message" rows="4" required style="padding:10px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx);font-family:inherit"></textarea></label>
   <button type="submit" class="btn btn-p">📅 Request Meeting</button>
  </form>
 </div>
</section>

<script>
document.getElementById('booking-form').addEventListener('submit', function(e){
 e.preventDefault();
 var d=Object.fromEntries(new FormData(e.target));
 var body={name:d.name, email:d.email, category:'meeting',
  subject:'Meeting request: '+d.meeting+' on '+d.day, message:d.message};
 fetch('/api/contact/general', {method:'POST', headers:{'Content-Type':'application/json'}, body:JSON.stringify(body)})
 .then(function(r){return r.json().then(function(j){return [r.ok, j]})})
 .then(function(res){
  if(res[0]){showNotification('Meeting requested. Reference '+res[1].id,'success');e.target.reset();}
  else{showNotification((res[1].errors||[res[1].error||'Request failed']).join('; '),'error');}
 })
 .catch(function(){showNotification('Network error, please try again','error')});
});
</script>
"""

# ═══════════════════════════════════════════════════════════════════════
# Root directory / 404
# ═══════════════════════════════════════════════════════════════════════

DIRECTORY_HEADER = """<header class="hdr">
 <a href="/" class="hdr-id"><span class="hdr-logo">🔥 {{ site_name }}</span><span><b>Staff Directory</b><small>{{ domain }}</small></span></a>
</header>"""

PAGE_DIRECTORY = """
<div class="sec-h"><h1>👥 {{ site_name }} Team</h1><p>{{ count }} staff members · visit a personal page at <code>name.{{ domain }}</code></p></div>
<input id="dir-search" placeholder="Search by name, title or department..." style="width:100%;padding:12px 14px;background:var(--sf2);border:1px solid var(--bd);border-radius:8px;color:var(--tx);font-size:14px;margin-bottom:18px">
{% for dept, people in departments %}
<section class="sec dept">
 <div class="card-t">{{ dept }} ({{ people|length }})</div>
 <div class="grid">
 {% for e in people %}
  <a href="https://{{ e.id }}.{{ domain }}/" class="tool-card person" data-search="{{ (e.name ~ ' ' ~ e.title ~ ' ' ~ dept)|lower }}">
   <div style="display:flex;gap:12px;align-items:center">
    <span class="avatar{% if e.tier == 5 %} avatar-vip{% endif %}">{{ e.initials }}</span>
    <div><h3 style="margin:0">{{ e.name }}</h3><p style="margin:0">{{ e.title }}</p></div>
   </div>
   <span class="tier-badge tier-{{ e.tier }}" style="display:inline-block;margin-top:10px">Tier {{ e.tier }}</span>
  </a>
 {% endfor %}
 </div>
</section>
{% else %}
<div class="empty">No staff members are listed yet.</div>
{% endfor %}
<script>
document.getElementById('dir-search').addEventListener('input', function(e){
 var q=e.target.value.toLowerCase();
 document.querySelectorAll('.person').forEach(function(p){p.style.display=p.dataset.search.indexOf(q)>=0?'':'none'});
 document.querySelectorAll('.dept').forEach(function(s){
  s.style.display=Array.from(s.querySelectorAll('.person')).some(function(p){return p.style.display!=='none'})?'':'none';
 });
});
</script>
"""

PAGE_NOT_FOUND = """
<div class="card" style="max-width:560px;margin:60px auto;text-align:center;padding:40px">
 <div style="font-size:48px;margin-bottom:12px">🔍</div>
 <h1>Profile Not Found</h1>
 <p style="margin:12px 0 20px">No staff member is registered at <code>{{ subdomain }}.{{ domain }}</code>.</p>
 <a href="https://{{ domain }}/" class="btn btn-p">👥 Browse the Staff Directory</a>
</div>
"""
