"""
Tools page fragments — the department overview and the sub-pages under
/tools. Each renders to a fragment that generate_tools_page() places
inside <main class="tools-container">.
"""

TOOLS_CSS = """<style>
.tools-container{max-width:1400px;margin:0 auto;padding:24px 28px}
.t-panel{background:rgba(10,14,39,.8);border:1px solid var(--bd);border-radius:16px;padding:24px;margin:20px 0}
.t-panel h3{text-align:center;margin-bottom:16px}
.back{margin-top:24px;text-align:center}
.crm-live{display:flex;justify-content:space-between;align-items:center;margin-bottom:12px}
.crm-list{display:flex;flex-direction:column;gap:8px;max-height:420px;overflow-y:auto}
.crm-row{display:flex;gap:10px;align-items:flex-start;background:var(--sf2);border-radius:10px;padding:10px 12px;border-left:3px solid var(--bd)}
.crm-row .meta{font-size:11px;color:var(--tx2)}
.crm-row .val{margin-left:auto;font-family:'JetBrains Mono',monospace;font-weight:600;white-space:nowrap}
.period-btn,.filter-btn{padding:5px 10px;border-radius:6px;border:1px solid var(--bd);background:var(--sf2);color:var(--tx);font-size:11px;cursor:pointer}
.period-btn.active,.filter-btn.active{border-color:var(--gd);color:var(--gd)}
.wf-step{display:flex;gap:8px;align-items:center;font-size:12px;color:var(--tx2);margin:4px 0}
.wf-step b{color:var(--tx)}
.restricted{max-width:560px;margin:40px auto;text-align:center}
</style>"""

TOOLS_OVERVIEW = """
<h1>🔧 {{ employee.department }} Department Tools</h1>
<p style="color:var(--tx2)">Access specialized tools and resources for {{ employee.department|lower }} operations:</p>
{{ tool_cards }}
"""

TOOL_RESTRICTED = """
<div class="card restricted">
 <div style="font-size:42px">🔒</div>
 <h2>{{ title }}</h2>
 <p style="margin:10px 0 18px">This tool requires Tier {{ required }} access. {{ employee.name }} is currently Tier {{ employee.tier }}.</p>
 <a href="/tools" class="btn btn-s">← Back to All Tools</a>
</div>
"""

TOOL_DASHBOARD = """
<h1>{{ d.icon }} {{ d.title }}</h1>
<p style="color:var(--tx2)">{{ d.intro }}</p>

<div class="t-panel">
 <h3 style="color:var(--gd)">⚡ Live Performance</h3>
 <div class="stats">
 {% for s in d.stats %}
  <div class="stat"><div class="stat-v">{{ s.value }}</div><div class="stat-l">{{ s.label }}</div><div class="{{ s.trend }}" style="font-size:12px">{{ s.change }}</div></div>
 {% endfor %}
 </div>
</div>

<div class="grid">
{% for p in d.panels %}
 <div class="card"><h3>{{ p.icon }} {{ p.title }}</h3>{% for i in p['items'] %}<div style="font-size:13px;color:var(--tx2)">• {{ i }}</div>{% endfor %}</div>
{% endfor %}
</div>

<div class="t-panel">
 <h3 style="color:var(--tq)">{{ d.feed_title }}</h3>
 <table class="tbl">
  <thead><tr>{% for c in d.feed_columns %}<th>{{ c }}</th>{% endfor %}</tr></thead>
  <tbody>{% for row in d.feed %}<tr>{% for cell in row %}<td>{{ cell }}</td>{% endfor %}</tr>{% endfor %}</tbody>
 </table>
</div>

<div class="back"><a href="{{ back_url }}" class="btn btn-s">← Back to {{ back_label }}</a></div>
"""

VIP_HUB = """
<h1>👑 Enterprise VIP Management Center</h1>
<p style="color:var(--tx2)">Tools and business operations for managing elite client relationships:</p>

<div class="t-panel">
 <h3 style="color:var(--gd)">⚡ Live VIP Performance Dashboard</h3>
 <div class="stats">
 {% for s in stats %}
  <div class="stat"><div class="stat-v">{{ s.value }}</div><div class="stat-l">{{ s.label }}</div><div class="{{ s.trend }}" style="font-size:12px">{{ s.change }}</div></div>
 {% endfor %}
 </div>
</div>

{{ feature_cards }}

<div class="t-panel">
 <h3 style="color:var(--gd)">⚡ Quick VIP Actions</h3>
 {{ quick_actions }}
</div>
<div class="back"><a href="/tools" class="btn btn-s">← Back to All Tools</a></div>
"""

ESCALATION = """
<h1>🚨 VIP Escalation Command Center</h1>
<p style="color:var(--tx2)">Critical incident response and emergency management for VIP clients:</p>

<div class="t-panel">
 <h3 style="color:var(--or)">🎯 Escalation Command Center</h3>
 {{ escalation_buttons }}
</div>

<div class="card">
 <div class="card-t">Escalation Levels</div>
 <table class="tbl">
  <thead><tr><th>Level</th><th>Severity</th><th>Response</th><th>Owner</th></tr></thead>
  <tbody>{% for l in levels %}<tr><td><span class="badge b-rd">{{ l.level }}</span></td><td>{{ l.name }}</td><td>{{ l.response }}</td><td>{{ l.owner }}</td></tr>{% endfor %}</tbody>
 </table>
 <p style="margin-top:12px">VIP hotline {{ vip.hotline }} · Telegram {{ vip.telegram }}</p>
</div>
<div class="back"><a href="/tools" class="btn btn-s">← Back to All Tools</a></div>
"""

VIP_CRM = """
<h1>🤖 AI-Powered VIP CRM</h1>
<p style="color:var(--tx2)">Predictive insights, live client activity and automated follow-up for the VIP book.</p>

<div class="t-panel">
 <div class="crm-live">
  <h3 style="color:var(--gd);margin:0">📊 VIP Analytics Dashboard</h3>
  <div>{% for p in periods %}<button type="button" class="period-btn{% if p == 'today' %} active{% endif %}" data-period="{{ p }}">{{ p|capitalize }}</button> {% endfor %}</div>
 </div>
 <div class="stats">
  <div class="stat"><div class="stat-v" id="crm-revenue">—</div><div class="stat-l">Total Revenue</div><div class="up" id="crm-revenue-growth" style="font-size:12px"></div></div>
  <div class="stat"><div class="stat-v" id="crm-clients">—</div><div class="stat-l">Active Clients</div><div class="up" id="crm-client-growth" style="font-size:12px"></div></div>
  <div class="stat"><div class="stat-v" id="crm-conversion">—</div><div class="stat-l">Conversion Rate</div><div class="up" id="crm-conversion-growth" style="font-size:12px"></div></div>
  <div class="stat"><div class="stat-v" id="crm-response">—</div><div class="stat-l">Avg Response (ms)</div><div class="down" id="crm-response-improvement" style="font-size:12px"></div></div>
 </div>
 <table class="tbl" style="margin-top:16px">
  <thead><tr><th>Top Client</th><th>Tier</th><th>Revenue</th><th>Growth</th></tr></thead>
  <tbody id="crm-top-clients"><tr><td colspan="4" class="empty">Loading...</td></tr></tbody>
 </table>
</div>

<div class="grid">
 <div class="card">
  <div class="crm-live"><h3 style="color:var(--gd);margin:0">🧠 Live AI Insights</h3><span class="badge b-gn">Live</span></div>
  <div class="crm-list" id="crm-insights"><div class="empty">Analyzing client data...</div></div>
 </div>
 <div class="card">
  <div class="crm-live">
   <h3 style="color:var(--tq);margin:0">📊 Live Client Activity</h3>
   <div>{% for key, label in activity_filters %}<button type="button" class="filter-btn{% if key == 'all' %} active{% endif %}" data-filter="{{ key }}">{{ label }}</button> {% endfor %}</div>
  </div>
  <div class="crm-list" id="crm-activity"><div class="empty">Loading activity...</div></div>
 </div>
</div>

<div class="t-panel">
 <h3 style="color:var(--or)">⚡ Automated Workflows</h3>
 <div class="grid">
 {% for key, wf in workflows %}
  <div class="card" data-workflow="{{ key }}">
   <div class="crm-live"><h3 style="margin:0">{{ wf.name }}</h3><span class="badge b-gn">{{ wf.successRate }} success</span></div>
   <p>{{ wf.description }}</p>
   {% for step in wf.steps %}<div class="wf-step"><span class="tag">+{{ step.delay }}h</span><b>{{ step.action }}</b><span>{{ step.template }}</span></div>{% endfor %}
  </div>
 {% endfor %}
 </div>
</div>

<div class="card">
 <h3 style="color:var(--tq)">🎯 Smart Recommendations</h3>
 <div class="grid" id="crm-recommendations" style="margin-top:12px"><div class="empty">Loading recommendations...</div></div>
</div>

<div class="back"><a href="/tools/vip" class="btn btn-s">← Back to VIP Center</a></div>

<script>
(function(){
 var REFRESH_MS={{ refresh_ms }};
 var state={period:'today', filter:'all'};
 function el(tag, cls, text){var e=document.createElement(tag);if(cls)e.className=cls;if(text!==undefined)e.textContent=text;return e;}
 function getJSON(url){return fetch(url,{credentials:'same-origin'}).then(function(r){if(!r.ok)throw new Error(r.status);return r.json();});}
 function row(icon, title, meta, value, color){
  var r=el('div','crm-row');r.style.borderLeftColor=color;
  r.appendChild(el('span','',icon));
  var body=el('div');body.appendChild(el('div','',title));body.appendChild(el('div','meta',meta));r.appendChild(body);
  if(value!==undefined){var v=el('span','val',value);v.style.color=color;r.appendChild(v);}
  return r;
 }
 function loadInsights(){
  getJSON('/api/vip/insights').then(function(items){
   var box=document.getElementById('crm-insights');box.innerHTML='';
   items.forEach(function(i){box.appendChild(row(i.icon, i.title, i.description+' · '+i.timestamp, i.confidence+'%', i.color));});
  }).catch(function(){showNotification('Insights unavailable','error')});
 }
 function loadActivity(){
  getJSON('/api/vip/activity?filter='+encodeURIComponent(state.filter)).then(function(items){
   var box=document.getElementById('crm-activity');box.innerHTML='';
   if(!items.length){box.appendChild(el('div','empty','No recent activity'));return;}
   items.forEach(function(a){box.appendChild(row(a.icon, a.client, a.action+' · '+a.time, a.value, a.valueColor));});
  }).catch(function(){showNotification('Activity feed unavailable','error')});
 }
 function loadRecommendations(){
  getJSON('/api/vip/recommendations').then(function(items){
   var box=document.getElementById('crm-recommendations');box.innerHTML='';
   items.forEach(function(r){
    var c=el('div','card');c.style.borderColor='rgba('+r.buttonColor+',.5)';
    c.appendChild(el('h3','',r.icon+' '+r.title));c.appendChild(el('p','',r.description));
    var v=el('div','stat-v',r.value);v.style.fontSize='15px';v.style.color=r.color;c.appendChild(v);
    c.appendChild(el('div','stat-l',r.confidence+'% confidence'));
    box.appendChild(c);
   });
  }).catch(function(){showNotification('Recommendations unavailable','error')});
 }
 function loadAnalytics(){
  getJSON('/api/vip/analytics?period='+encodeURIComponent(state.period)).then(function(a){
   document.getElementById('crm-revenue').textContent=a.totalRevenue;
   document.getElementById('crm-revenue-growth').textContent='+'+a.revenueGrowth+'%';
   document.getElementById('crm-clients').textContent=a.activeClients;
   document.getElementById('crm-client-growth').textContent='+'+a.clientGrowth+'%';
   document.getElementById('crm-conversion').textContent=a.conversionRate+'%';
   document.getElementById('crm-conversion-growth').textContent='+'+a.conversionGrowth+'%';
   document.getElementById('crm-response').textContent=a.avgResponseTime;
   document.getElementById('crm-response-improvement').textContent='-'+a.responseImprovement+'%';
   var body=document.getElementById('crm-top-clients');body.innerHTML='';
   a.topClients.forEach(function(c){
    var tr=el('tr');[c.name,c.tier,c.revenue,'+'+c.growth+'%'].forEach(function(v){tr.appendChild(el('td','',v))});
    body.appendChild(tr);
   });
  }).catch(function(){showNotification('Analytics unavailable','error')});
 }
 document.querySelectorAll('.period-btn').forEach(function(b){b.addEventListener('click',function(){
  state.period=b.dataset.period;
  document.querySelectorAll('.period-btn').forEach(function(x){x.classList.toggle('active',x===b)});
  loadAnalytics();
 })});
 document.querySelectorAll('.filter-btn').forEach(function(b){b.addEventListener('click',function(){
  state.filter=b.dataset.filter;
  document.querySelectorAll('.filter-btn').forEach(function(x){x.classList.toggle('active',x===b)});
  loadActivity();
 })});
 function refresh(){loadInsights();loadActivity();loadAnalytics();}
 refresh();loadRecommendations();
 setInterval(refresh, REFRESH_MS);
})();
</script>
"""
